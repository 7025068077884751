from telemed.main import run

run()
