from gherkinpy.cli import main

raise SystemExit(main())
