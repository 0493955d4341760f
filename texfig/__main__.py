from texfig.cli import app

app(prog_name="texfig")
