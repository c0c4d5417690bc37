from .dragon_client import main

main()
