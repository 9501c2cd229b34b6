from compatflags.cli.cli import main

main()
