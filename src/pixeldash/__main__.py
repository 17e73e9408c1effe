from pixeldash.main import main

main()
