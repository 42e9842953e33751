from src.documents.run import main

main()
