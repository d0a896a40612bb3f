"""
Unit tests для Identity, AuthState и Profile.
"""

import pytest

from blogify.domain.entities.identity import AuthState, Identity
from blogify.domain.entities.profile import Profile
from blogify.shared.exceptions.domain_exceptions import NotAuthenticatedError


def test_signed_in():
    state = AuthState(identity=Identity(id="u1", email="ada@example.com"))

    assert state.is_authenticated
    assert not state.should_redirect
    assert state.require_identity().id == "u1"


def test_signed_out_redirects():
    state = AuthState()

    assert state.should_redirect
    with pytest.raises(NotAuthenticatedError, match="Sign in required"):
        state.require_identity()


def test_loading_does_not_redirect():
    state = AuthState(loading=True)

    assert not state.should_redirect
    with pytest.raises(NotAuthenticatedError, match="loading"):
        state.require_identity()


def test_handle_falls_back_to_id():
    assert Identity(id="u1").handle == "u1"
    assert Identity(id="u1", email="ada@example.com").handle == "ada@example.com"


def test_profile_display_name():
    assert Profile(user_id="u1", full_name="Ada").display_name("fallback") == "Ada"
    assert Profile(user_id="u1").display_name("fallback") == "fallback"
    assert Profile(user_id="u1", full_name="  ").display_name("fallback") == "fallback"
