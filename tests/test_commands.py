"""
Tests for the tanda_c2b management command.
"""
from io import StringIO
from unittest.mock import patch

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

from tanda.models import TandaFunding

COMMAND = "tanda.management.commands.tanda_c2b.C2BService"


def _run(*args):
    out = StringIO()
    call_command("tanda_c2b", *args, stdout=out)
    return out.getvalue()


def test_detect_only():
    output = _run("--phone", "0763123456", "--detect-only")

    assert "Service provider: EQUITEL" in output


def test_unknown_number_is_rejected():
    with pytest.raises(CommandError, match="Could not detect"):
        _run("--phone", "0200123456", "--detect-only")


def test_missing_request_arguments():
    with pytest.raises(CommandError, match="--merchant-wallet"):
        _run("--phone", "0712345678", "--amount", "10", "--endpoint", "e", "--result-url", "r")


def test_sends_request_with_detected_provider():
    funding = TandaFunding(
        fund_reference="ref-1",
        service_provider="MPESA",
        account_number="0712345678",
        amount="10",
        response_status="000001",
        response_message="Request received",
        transaction_id="TXN1",
    )

    with patch(COMMAND) as service_cls:
        service_cls.return_value.request.return_value = funding
        output = _run(
            "--phone", "0712345678",
            "--amount", "10",
            "--merchant-wallet", "600100",
            "--endpoint", "io/v2/organizations/ORG1/requests",
            "--result-url", "https://merchant.test/result",
            "--org-id", "ORG1",
            "--mode", "live",
        )

    service_cls.assert_called_once_with(
        {"mode": "live"},
        "ORG1",
        "https://merchant.test/result",
        "io/v2/organizations/ORG1/requests",
        wait_for_token=True,
    )
    service_cls.return_value.request.assert_called_once_with({
        "serviceProviderId": "MPESA",
        "merchantWallet": "600100",
        "mobileNumber": "0712345678",
        "amount": "10",
    })
    assert "Status: 000001 Request received" in output
    assert "Transaction ID: TXN1" in output
