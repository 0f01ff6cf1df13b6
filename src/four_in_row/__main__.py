from four_in_row.main import main

main()
