from shglob.cli import app

app(prog_name="shglob")
