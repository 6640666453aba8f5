from userapp.main import run

run()
