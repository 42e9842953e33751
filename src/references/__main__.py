from src.references.run import main

main()
