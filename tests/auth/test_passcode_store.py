from datetime import datetime, timedelta, timezone

from thekedar.auth.otp import MockOtpProvider
from thekedar.auth.passcode_store import PasscodeStore, PasscodeSweeper


class FakeClock:
    def __init__(self):
        self.now = datetime(2026, 3, 1, 9, 0, tzinfo=timezone.utc)

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now += timedelta(**kwargs)


def test_reissue_invalidates_previous_code():
    store = PasscodeStore()
    store.issue("9876543210", "111111")
    store.issue("9876543210", "222222")

    assert store.verify("9876543210", "111111") is False
    assert store.verify("9876543210", "222222") is True


def test_passcode_is_single_use():
    store = PasscodeStore()
    store.issue("9876543210", "123456")

    assert store.verify("9876543210", "123456") is True
    assert store.verify("9876543210", "123456") is False


def test_wrong_code_keeps_pending_code():
    store = PasscodeStore()
    store.issue("9876543210", "123456")

    assert store.verify("9876543210", "000000") is False
    assert store.verify("9876543210", "123456") is True


def test_expired_code_is_rejected_and_removed():
    clock = FakeClock()
    store = PasscodeStore(ttl=timedelta(minutes=5), clock=clock)
    store.issue("9876543210", "123456")

    clock.advance(minutes=5, seconds=1)

    assert store.verify("9876543210", "123456") is False
    assert store.peek("9876543210") is None


def test_code_still_valid_at_expiry_instant():
    clock = FakeClock()
    store = PasscodeStore(ttl=timedelta(minutes=5), clock=clock)
    store.issue("9876543210", "123456")

    clock.advance(minutes=5)

    assert store.verify("9876543210", "123456") is True


def test_unknown_phone_fails():
    assert PasscodeStore().verify("9876543210", "123456") is False


def test_sweep_drops_only_expired_codes():
    clock = FakeClock()
    store = PasscodeStore(ttl=timedelta(minutes=5), clock=clock)
    store.issue("1111111111", "111111")
    clock.advance(minutes=4)
    store.issue("2222222222", "222222")
    clock.advance(minutes=2)

    assert store.sweep() == 1
    assert len(store) == 1
    assert store.peek("2222222222") is not None


def test_sweeper_starts_and_stops():
    sweeper = PasscodeSweeper(PasscodeStore(), interval_seconds=0.01)
    sweeper.start()
    assert sweeper.running

    sweeper.stop()
    assert not sweeper.running


def test_mock_provider_fixed_code():
    provider = MockOtpProvider(use_fixed_code=True, start_sweeper=False)

    assert provider.send_otp("9876543210") == "123456"
    assert provider.verify_otp("9876543210", "123456") is True


def test_mock_provider_random_code_is_six_digits():
    provider = MockOtpProvider(start_sweeper=False)

    code = provider.send_otp("9876543210")

    assert len(code) == 6 and code.isdigit()
    assert provider.verify_otp("9876543210", code) is True
