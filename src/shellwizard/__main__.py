from shellwizard.cli import main

raise SystemExit(main())
