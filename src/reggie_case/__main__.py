from reggie_case import cli

if __name__ == "__main__":
    cli.main()
