from discord_relay.launcher import main

main()
