from messenger.main import main

main()
