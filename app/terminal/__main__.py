from app.terminal.console import main

main()
