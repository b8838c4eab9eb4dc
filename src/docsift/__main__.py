from docsift._cli import main

main()
