from basketprice.cli import main

main()
