"""spotify_auth.py

Walk through the authorization-code flow in a terminal and print the refresh
token it yields, ready to be stored for ``AuthCodeClient.from_refresh_token``.

* Settings come from ``SPOTIFY_*`` variables (see
  :class:`spotify_api.ClientConfig`); a ``KEY=VALUE`` file can pre-seed them.
* PKCE is used when no client secret is configured, or with ``--pkce``.
* The ``state`` of the pasted redirect URL is checked before the code is
  exchanged.
* The refresh token is masked unless ``--show-secrets`` is given.

Usage::

    SPOTIFY_CLIENT_ID=... SPOTIFY_REDIRECT_URI=http://localhost:8888/callback \\
        python scripts/spotify_auth.py --scopes "user-read-email playlist-read-private"
"""
from __future__ import annotations

import argparse
import dataclasses
import os
import sys
from pathlib import Path

from spotify_api import AuthCodeClient, AuthCodePkceClient, ClientConfig, SpotifyError
from spotify_api.auth import parse_redirect, parse_scopes
from spotify_api.utils.logging import mask_sensitive, setup_logging

DEFAULT_ENV_FILE = Path("scripts/.env.spotify")


# --------------------------------------------------------------------------- #
# Settings
# --------------------------------------------------------------------------- #
def _read_env_file(path: Path) -> dict[str, str]:
    """Parse ``KEY=VALUE`` lines, skipping blanks and ``#`` comments."""
    pairs: dict[str, str] = {}
    for line in path.read_text(encoding="utf-8").splitlines():
        key, sep, value = line.strip().partition("=")
        if sep and key and not key.startswith("#"):
            pairs[key.strip()] = value.strip()
    return pairs


def _load_config(env_file: Path | None, scopes: str | None) -> ClientConfig:
    path = env_file or (DEFAULT_ENV_FILE if DEFAULT_ENV_FILE.exists() else None)
    if path is not None:
        # variables already exported win over the file
        for key, value in _read_env_file(path).items():
            os.environ.setdefault(key, value)

    try:
        config = ClientConfig.from_env()
    except ValueError as exc:
        sys.exit(str(exc))
    if not config.redirect_uri:
        sys.exit("SPOTIFY_REDIRECT_URI is not set")
    if scopes:
        config = dataclasses.replace(config, scopes=parse_scopes(scopes))
    return config


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Obtain a Spotify refresh token.")
    parser.add_argument("--env-file", type=Path, help=f"KEY=VALUE file (default: {DEFAULT_ENV_FILE})")
    parser.add_argument("--scopes", help="Space or comma separated scopes (overrides SPOTIFY_SCOPES)")
    parser.add_argument("--pkce", action="store_true", help="Use PKCE even if a secret is set")
    parser.add_argument("--show-secrets", action="store_true", help="Print the refresh token unmasked")
    parser.add_argument("--log-level", help="Logging level (default: SPOTIFY_LOG_LEVEL or WARNING)")
    return parser


# --------------------------------------------------------------------------- #
# Flow
# --------------------------------------------------------------------------- #
def main() -> None:
    args = _build_parser().parse_args()
    setup_logging(args.log_level)
    config = _load_config(args.env_file, args.scopes)

    if args.pkce or not config.client_secret:
        flow: AuthCodeClient | AuthCodePkceClient = AuthCodePkceClient(config=config)
    else:
        flow = AuthCodeClient(config=config)

    print("Open this URL in a browser and approve access:\n")
    print(f"  {flow.authorize_url}\n")
    redirect_url = input("Paste the URL you were redirected to: ")

    try:
        code, state = parse_redirect(redirect_url)
        client = flow.authenticate(code, state)
        me = client.current_user().get()
    except SpotifyError as exc:
        sys.exit(f"Authentication failed: {exc}")

    token = client.token
    refresh_token = token.refresh_token if token else None
    shown = refresh_token if args.show_secrets else mask_sensitive(refresh_token, 6)

    print(f"\nAuthenticated as {me.display_name or me.id} ({flow.flow.name})")
    print(f"Scopes: {' '.join(sorted(token.scopes)) if token else ''}")
    print(f"Refresh token: {shown}")


if __name__ == "__main__":
    main()
