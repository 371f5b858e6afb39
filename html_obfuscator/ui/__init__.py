"""Host-neutral UI plumbing around the obfuscator core.

WHY: The obfuscate/copy workflow, its messages and its error handling
are the same whether the host is a Tkinter window, a test, or some other
toolkit. Only the widgets differ.

HOW: notifications.py defines severities, messages and the notification
sink interface. controller.py drives the workflow through three small
interfaces (text surface, clipboard, sink) that each host implements.

RULES:
- Nothing in this package imports tkinter
- The core never sees these interfaces; only the controller does
"""
