from cmd_dispatch.cli import run

if __name__ == "__main__":
    run()
