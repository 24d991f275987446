from cmdrunner.interfaces.cli.app import main

main()
