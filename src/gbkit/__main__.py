from gbkit.cli import main

raise SystemExit(main())
