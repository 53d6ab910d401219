from book_catalog.cli import main

main()
