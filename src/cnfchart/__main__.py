from cnfchart.main import main

raise SystemExit(main())
