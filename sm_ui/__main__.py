from sm_ui.cli.main import main

main()
