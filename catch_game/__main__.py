from catch_game.main import main

raise SystemExit(main())
