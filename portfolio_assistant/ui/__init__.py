"""NiceGUI interface - thin presentation layer over the chat session.

Responsibilities:
    - Transcript display with markdown, suggestion chips and video links
    - Starter prompt cards before the first turn
    - Typing indicator and input disablement while a turn is pending
    - Autoscroll on every transcript change

Contains no conversation logic. Reads from the session store and submits
turns to the dispatch controller.
"""
