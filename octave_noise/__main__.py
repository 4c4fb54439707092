from octave_noise.cli import main

raise SystemExit(main())
