from projectsapp.main import main

main()
