"""Allow ``python -m pages_deploy``"""

from .cli.main import main

main()
