from stackseed.cli.app import app

app(prog_name="stackseed")
