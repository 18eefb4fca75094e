"""Entrypoint that reads PORT from environment, no shell expansion needed."""
from github_mapper.server import main

if __name__ == "__main__":
    main()
