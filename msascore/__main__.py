from msascore.cli import main

main()
