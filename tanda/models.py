"""
Request, payload and result models for Tanda C2B operations.
"""

import json
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .constants import C2B_COMMAND_ID


class C2BRequest(BaseModel):
    """Details of a customer-to-business payment request."""

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    service_provider_id: str = Field(..., alias="serviceProviderId")
    merchant_wallet: str = Field(..., alias="merchantWallet")
    mobile_number: str = Field(..., alias="mobileNumber")
    amount: str
    custom_fields_key_value: Optional[Dict[str, str]] = Field(None, alias="customFieldsKeyValue")


class RequestParameter(BaseModel):
    """A single id/label/value entry in a Tanda command payload."""

    id: str
    label: str
    value: str

    @classmethod
    def named(cls, name: str, value: str) -> "RequestParameter":
        return cls(id=name, label=name, value=value)


class C2BRequestPayload(BaseModel):
    """
    Wire payload for a C2B command.

    Field order is significant to the upstream API and is preserved by
    ``to_wire()``.
    """

    model_config = ConfigDict(populate_by_name=True)

    command_id: str = Field(C2B_COMMAND_ID, alias="commandId")
    service_provider_id: str = Field(..., alias="serviceProviderId")
    request_parameters: List[RequestParameter] = Field(..., alias="requestParameters")
    reference_parameters: List[RequestParameter] = Field(..., alias="referenceParameters")
    reference: str

    @classmethod
    def build(cls, request: C2BRequest, result_url: str, reference: str) -> "C2BRequestPayload":
        """
        Build the payload for a C2B request.

        Args:
            request: Payment request details
            result_url: URL Tanda posts the transaction result to
            reference: Unique reference for this request

        Returns:
            C2BRequestPayload ready to send
        """
        return cls(
            service_provider_id=request.service_provider_id,
            request_parameters=[
                RequestParameter.named("merchantWallet", request.merchant_wallet),
                RequestParameter.named("accountNumber", request.mobile_number),
                RequestParameter.named("amount", request.amount),
            ],
            reference_parameters=[
                RequestParameter.named("resultUrl", result_url),
            ],
            reference=reference,
        )

    def to_wire(self) -> Dict[str, Any]:
        """Serialize with the camelCase names the API expects."""
        return self.model_dump(by_alias=True)


class TandaAPIResponse(BaseModel):
    """Response body returned by Tanda for command requests."""

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    status: Optional[str] = None
    message: Optional[str] = None
    id: Optional[str] = None


class TandaFunding(BaseModel):
    """
    Outcome of a single C2B request attempt.

    Created with the request details and empty response fields, then filled
    in once the API call resolves or fails.
    """

    model_config = ConfigDict(populate_by_name=True)

    fund_reference: str = Field(..., alias="fundReference")
    service_provider: str = Field(..., alias="serviceProvider")
    account_number: str = Field(..., alias="accountNumber")
    amount: str
    json_response: Optional[str] = Field(None, alias="jsonResponse")
    transaction_id: Optional[str] = Field(None, alias="transactionId")
    response_status: Optional[str] = Field(None, alias="responseStatus")
    response_message: Optional[str] = Field(None, alias="responseMessage")

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)

    def to_json(self) -> str:
        return json.dumps(self.to_dict())
