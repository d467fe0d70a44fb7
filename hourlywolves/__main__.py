from hourlywolves.cli import app

app(prog_name="hourlywolves")
