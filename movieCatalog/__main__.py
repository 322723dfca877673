from movieCatalog.main import main

main()
