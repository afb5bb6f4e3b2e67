# roster/topics/__init__.py
#
# Collects every topic's COMMANDS table for init_core().

from roster.topics import directory

ALL_COMMANDS = {}
ALL_COMMANDS.update(directory.COMMANDS)
