from neonpong.app import main

main()
