from kitty_cli.cli import main

main()
