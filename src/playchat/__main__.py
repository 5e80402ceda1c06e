"""Run with: python -m playchat"""
import sys

from playchat.main import main

sys.exit(main())
