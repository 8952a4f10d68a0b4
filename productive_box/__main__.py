from productive_box.main import main

main()
