from knights_quest.cli import run

run()
