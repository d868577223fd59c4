from inivars.cli.app import app

app(prog_name="inivars")
