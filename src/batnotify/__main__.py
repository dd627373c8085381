from batnotify.cli import main

main()
