from mcfetch.cli import app

app(prog_name="mcfetch")
