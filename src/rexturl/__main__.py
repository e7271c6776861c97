from rexturl.cli import main

raise SystemExit(main())
