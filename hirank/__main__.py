from hirank.cmdline import main

main()
