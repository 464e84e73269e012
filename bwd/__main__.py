from bwd.cli import main

main()
