"""Account portal client - logs in with a headless browser and reads the meal balance"""

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import async_playwright

from meal_topup.config import settings
from meal_topup.domain.exceptions import PortalError
from meal_topup.domain.extraction import extract_balance
from meal_topup.domain.models import BalanceRecord
from meal_topup.infrastructure.observability.metrics import portal_fetch_latency_histogram

PHONE_INPUT = ".modal-content input#phone"
PASSWORD_INPUT = ".modal-content input#password-field"
CONFIRM_BUTTON = ".modal-content button.button-confirm"
BALANCE_PANEL = ".balance-and-date"
BALANCE_TEXT = ".balance-and-date .balance"
DATE_TEXT = ".balance-and-date .date"


class PortalClient:
    """Client for the prepaid meal account portal"""

    def __init__(
        self,
        account_url: str | None = None,
        username: str | None = None,
        password: str | None = None,
        timeout: float | None = None,
    ):
        self.account_url = account_url or settings.account_url
        self.username = username if username is not None else settings.account_username
        self.password = (
            password if password is not None else settings.account_password.get_secret_value()
        )
        self.timeout = timeout or settings.portal_timeout_seconds

    async def fetch_raw_balance(self) -> tuple[str, str]:
        """
        Log in and read the balance and last top-up texts from the account page.

        Login is two steps: phone number, then password, each confirmed in a modal.

        Raises:
            PortalError: On timeout, navigation errors, or a changed login flow
        """
        async with async_playwright() as playwright:
            try:
                browser = await playwright.chromium.launch(headless=True)
            except PlaywrightError as e:
                raise PortalError(f"Could not start browser: {e}") from e

            try:
                page = await browser.new_page()
                page.set_default_timeout(self.timeout * 1000)
                await page.goto(self.account_url)

                await page.wait_for_selector(PHONE_INPUT, state="visible")
                await page.fill(PHONE_INPUT, self.username)
                await page.click(CONFIRM_BUTTON)

                await page.wait_for_selector(PASSWORD_INPUT, state="visible")
                await page.fill(PASSWORD_INPUT, self.password)
                await page.click(CONFIRM_BUTTON)

                await page.wait_for_selector(BALANCE_PANEL, state="visible")
                balance_text = await page.inner_text(BALANCE_TEXT)
                date_text = await page.inner_text(DATE_TEXT)
            except PlaywrightError as e:
                # TimeoutError is a subclass of Error
                raise PortalError(f"Account portal error: {e.message}") from e
            finally:
                await browser.close()

        return balance_text, date_text

    async def get_balance(self) -> BalanceRecord:
        """
        Fetch and parse the current meal account balance.

        Raises:
            PortalError: If the portal could not be read
            ExtractionError: If the page texts do not match the expected format
        """
        with portal_fetch_latency_histogram.time():
            balance_text, date_text = await self.fetch_raw_balance()
        return extract_balance(balance_text, date_text)
