"""
C2B service for Tanda customer-to-business payments.
Builds payment requests and maps responses to funding records.
"""

import json
import logging
import uuid
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from ..client import TandaClient
from ..constants import SUCCESS_STATUS
from ..models import C2BRequest, C2BRequestPayload, TandaAPIResponse, TandaFunding

logger = logging.getLogger(__name__)


class C2BService:
    """
    Service for customer-to-business payment requests.

    Failures never escape ``request()``: they are recorded on the returned
    TandaFunding instead.
    """

    def __init__(
        self,
        config: Optional[Mapping[str, Any]],
        organization_id: str,
        result_url: str,
        endpoint: str,
        *,
        client: Optional[TandaClient] = None,
        **client_kwargs,
    ):
        """
        Initialize the C2B service.

        Args:
            config: Configuration for the underlying TandaClient
            organization_id: ID assigned to the organization by Tanda
            result_url: URL Tanda posts transaction results to
            endpoint: API endpoint for C2B requests
            client: Existing client to send requests with (``config`` and
                ``client_kwargs`` are ignored when given)
            **client_kwargs: Extra TandaClient arguments (settings, session,
                timeout, wait_for_token)
        """
        self.client = client if client is not None else TandaClient(config, **client_kwargs)
        # Not sent with requests yet
        self.org_id = organization_id
        self.result_url = result_url
        self.endpoint = endpoint

    @staticmethod
    def _unsent_funding(reference: str, data: Any) -> TandaFunding:
        """Funding record for input that could not be turned into a request."""
        fields = data if isinstance(data, Mapping) else {}

        def field(alias: str, name: str) -> str:
            value = fields.get(alias, fields.get(name))
            return "" if value is None else str(value)

        return TandaFunding(
            fund_reference=reference,
            service_provider=field("serviceProviderId", "service_provider_id"),
            account_number=field("mobileNumber", "mobile_number"),
            amount=field("amount", "amount"),
        )

    def build_payload(self, request: C2BRequest, reference: str) -> C2BRequestPayload:
        return C2BRequestPayload.build(request, self.result_url, reference)

    def request(self, data: Union[C2BRequest, Mapping[str, Any]]) -> TandaFunding:
        """
        Send a C2B payment request to the Tanda API.

        Args:
            data: C2BRequest, or a mapping with serviceProviderId,
                merchantWallet, mobileNumber, amount and optional
                customFieldsKeyValue

        Returns:
            TandaFunding with the request details and the API outcome.
            ``transaction_id`` is set only when Tanda accepts the request.
        """
        reference = str(uuid.uuid4())

        try:
            request = data if isinstance(data, C2BRequest) else C2BRequest.model_validate(data)
        except ValidationError as e:
            logger.error(f"Invalid C2B request. Reference: {reference}, Error: {str(e)}")
            funding = self._unsent_funding(reference, data)
            funding.response_status = "500"
            funding.response_message = str(e)
            return funding

        payload = self.build_payload(request, reference)

        funding = TandaFunding(
            fund_reference=reference,
            service_provider=request.service_provider_id,
            account_number=request.mobile_number,
            amount=request.amount,
        )

        logger.info(
            f"Sending C2B request. Reference: {reference}, "
            f"Provider: {request.service_provider_id}"
        )

        try:
            response = self.client.call(self.endpoint, {'json': payload.to_wire()}, "POST")
            funding.json_response = json.dumps(response)

            if isinstance(response, Mapping):
                api_response = TandaAPIResponse.model_validate(response)
                funding.response_status = api_response.status
                funding.response_message = api_response.message
                funding.transaction_id = (
                    api_response.id if api_response.status == SUCCESS_STATUS else None
                )
        except Exception as e:
            error_code = getattr(e, 'error_code', None)
            funding.response_status = str(error_code) if error_code else "500"
            funding.response_message = str(e) or "Unknown Error"
            logger.error(f"C2B request failed. Reference: {reference}, Error: {str(e)}")
        else:
            logger.info(
                f"C2B request completed. Reference: {reference}, "
                f"Status: {funding.response_status}"
            )

        return funding
