"""
Lint script runner.
"""
import subprocess

TARGETS = ["./loxlang", "./lox.py", "./scripts"]


def main():
    """
    Lint the Lox project using flake8 and pylint.
    """
    print("Running flake8...")
    subprocess.run([
        "flake8",
        *TARGETS,
        "--max-line-length=100",
        "--exclude=loxlang/tests",
    ], check=True)

    print("Running pylint...")
    subprocess.run([
        "pylint",
        *TARGETS,
        "--ignore=tests",
        "--max-line-length=100",
    ], check=True)


if __name__ == "__main__":
    main()
