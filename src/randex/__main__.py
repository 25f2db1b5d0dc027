from randex.cli import main

raise SystemExit(main())
