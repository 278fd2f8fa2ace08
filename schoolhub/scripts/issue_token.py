"""
Mint a development access token for calling the API by hand.

Usage:
  python -m schoolhub.scripts.issue_token --user-id u-1 --user-type Admin --campus-id c-1
  python -m schoolhub.scripts.issue_token --user-id p-1 --user-type Parent --campus-id c-1 --minutes 600
"""

import argparse

from schoolhub.auth.security import create_access_token
from schoolhub.core.enums import UserType


def main() -> None:
    parser = argparse.ArgumentParser(description="Issue a signed access token")
    parser.add_argument("--user-id", required=True)
    parser.add_argument("--user-type", required=True, choices=[t.value for t in UserType])
    parser.add_argument("--campus-id", default=None, help="Campus scope (optional for Super Admin)")
    parser.add_argument("--minutes", type=int, default=None, help="Lifetime; defaults to ACCESS_TOKEN_EXPIRE_MINUTES")
    args = parser.parse_args()

    claims = {"user_id": args.user_id, "user_type": args.user_type}
    if args.campus_id:
        claims["campus_id"] = args.campus_id
    print(create_access_token(subject=claims, expires_minutes=args.minutes))


if __name__ == "__main__":
    main()
