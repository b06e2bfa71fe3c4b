from splitjoin.cli.main import main

main()
