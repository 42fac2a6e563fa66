from fastapi import FastAPI
from fastapi.responses import HTMLResponse
import os

app = FastAPI(title="Mock Account Portal", version="1.0.0")
# Values rendered on the account page; override to exercise other balances
BALANCE_TEXT = os.getenv("MOCK_BALANCE_TEXT", "Saldo: 130.00 NOK")
DATE_TEXT = os.getenv("MOCK_DATE_TEXT", "01.03.2024 12:30")

PAGE = """<!doctype html>
<html>
<body>
  <div class="modal-content" id="phone-step">
    <input id="phone" type="tel">
    <button class="button-confirm" onclick="showPassword()">Neste</button>
  </div>
  <div class="modal-content" id="password-step" style="display:none">
    <input id="password-field" type="password">
    <button class="button-confirm" onclick="showBalance()">Logg inn</button>
  </div>
  <div class="balance-and-date" style="display:none">
    <span class="balance">{balance}</span>
    <span class="date">{date}</span>
  </div>
  <script>
    function showPassword() {{
      document.getElementById("phone-step").remove();
      document.getElementById("password-step").style.display = "block";
    }}
    function showBalance() {{
      document.getElementById("password-step").remove();
      document.querySelector(".balance-and-date").style.display = "block";
    }}
  </script>
</body>
</html>
"""

@app.get("/health")
def health(): return {"status": "ok"}

@app.get("/", response_class=HTMLResponse)
def account_page():
    return PAGE.format(balance=BALANCE_TEXT, date=DATE_TEXT)
