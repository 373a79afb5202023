from smart_todo.cli.main import main

raise SystemExit(main())
