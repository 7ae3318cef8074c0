from snipcheck.cli import main

main()
