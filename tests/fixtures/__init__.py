"""
Test fixtures for thread detection.

Contains sample correspondence for testing:
- single_email.txt: One formatted email (four headers, no separators)
- outlook_thread.txt: Outlook reply chain with underscore separators
- word_export.txt: Two messages exported from a Word document
"""
