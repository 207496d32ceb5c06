from vanity.cli import main

main()
