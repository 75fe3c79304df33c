from typedset.compiler.cli import main

raise SystemExit(main())
