from radixcomplete.cli import main

main()
