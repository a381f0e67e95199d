from distance_graph.cli import main

raise SystemExit(main())
