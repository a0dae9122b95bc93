"""
Use Cases

All use cases are organized into domain folders:
- auth/: Registration, login and password flows
- users/: Current user profile
- subreddits/: Community management
- posts/: Post management

Import from subdirectories.
"""
