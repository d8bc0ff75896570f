from prdash.app_main import run

if __name__ == "__main__":
    run()
