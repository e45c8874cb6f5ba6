"""
GuardWatch backend root package.

Ingests camera detection events per account, stores them in MongoDB and
pushes new/updated events to the account's live WebSocket sessions.
"""
