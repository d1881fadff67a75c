from puglia_bot.app import main

raise SystemExit(main())
