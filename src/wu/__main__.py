from wu.cli import main

main()
