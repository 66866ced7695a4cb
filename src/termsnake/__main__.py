from .game import main

raise SystemExit(main())
