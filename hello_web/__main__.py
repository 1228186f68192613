from __future__ import annotations

from hello_web.main import main


if __name__ == "__main__":
    main()
