from costar.cli import main

raise SystemExit(main())
