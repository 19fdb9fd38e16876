from trycmd.cli import main

raise SystemExit(main())
