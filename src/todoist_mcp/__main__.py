from todoist_mcp.main import main

main()
