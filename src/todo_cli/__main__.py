from todo_cli.cli.main import entry

entry()
