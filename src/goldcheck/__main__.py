from goldcheck.cli.main import main

raise SystemExit(main())
