from pptxnotes.cli import main

raise SystemExit(main())
