"""Small helpers for characters, bytes, strings, linked lists, line reading and formatted output."""