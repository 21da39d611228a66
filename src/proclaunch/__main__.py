from proclaunch.cli import main

raise SystemExit(main())
