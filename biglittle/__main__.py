from biglittle.cli import main

main()
