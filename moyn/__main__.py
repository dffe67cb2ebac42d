from moyn.main import main

main()
