from juliarun.cli import main

raise SystemExit(main())
