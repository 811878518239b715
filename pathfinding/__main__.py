from pathfinding.demo import main

raise SystemExit(main())
