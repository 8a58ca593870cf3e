"""HTML template for the calculator page (rendered with render_template_string)."""

HTML_TEMPLATE = r"""
<!DOCTYPE html>
<html lang="{{ lang }}">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>{{ t.title }}</title>
<style>
  *{margin:0;padding:0;box-sizing:border-box}
  :root{
    --primary:{{ brand.primaryColor }};
    --accent:{{ brand.accentColor }};
    --header:{{ brand.headerColor }};
  }
  body{
    background:#f9fafb;color:#111827;
    font-family:system-ui,-apple-system,sans-serif;line-height:1.5;
    min-height:100vh;display:flex;flex-direction:column;justify-content:space-between;
  }
  header,footer{background:var(--header);color:#d1d5db;text-align:center;font-size:.85rem;padding:1rem}
  .card{
    max-width:36rem;margin:2.5rem auto;padding:1.5rem;background:#fff;
    border-radius:1rem;box-shadow:0 10px 25px rgba(0,0,0,.08);
  }
  .card > * + *{margin-top:1.25rem}
  .topbar{display:flex;justify-content:space-between;align-items:center;gap:.5rem}
  .topbar img{height:2rem}
  .brand-name{font-weight:700;font-size:1.1rem}
  .toggles{display:flex;gap:.5rem}
  .toggle{background:var(--primary);border:0;border-radius:.3rem;padding:.25rem .75rem;font-size:.85rem;cursor:pointer}
  h1{font-size:1.15rem;text-align:center}
  .muted{color:#4b5563;text-align:center}
  .formula{background:#fef9c3;border:1px solid #fde047;color:#854d0e;border-radius:.3rem;padding:.75rem;text-align:center}
  .formula strong{text-decoration:underline;display:block}
  label{display:block}
  input{width:100%;margin-top:.25rem;padding:.5rem;border:1px solid #d1d5db;border-radius:.3rem;font-size:1rem}
  .fields > * + *{margin-top:1rem}
  .buttons{display:flex;gap:1rem}
  .buttons button{flex:1;padding:.5rem;border:0;border-radius:.3rem;cursor:pointer;font-size:1rem}
  .btn-today{background:#86efac}
  .btn-calc{background:var(--accent)}
  .btn-clear{width:100%;background:#991b1b;color:#fff;padding:.5rem;border:0;border-radius:.3rem;cursor:pointer}
  .notice{color:#ef4444;text-align:center}
  .error{background:#fee2e2;border:1px solid #fca5a5;color:#991b1b;border-radius:.3rem;padding:.75rem;text-align:center}
  .result{background:#f3f4f6;border-radius:.5rem;padding:1rem}
  .result p + p{margin-top:.4rem}
</style>
</head>
<body>
<header></header>
<form class="card" method="post" action="{{ url_for('ui.calculator') }}">
  <input type="hidden" name="lang" value="{{ lang }}">
  <input type="hidden" name="brand" value="{{ brand.key }}">
  {# first submit button is what Enter triggers #}
  <button type="submit" name="action" value="calculate" tabindex="-1" aria-hidden="true"
          style="position:absolute;left:-9999px"></button>

  <div class="topbar">
    {% if brand.logoUrl %}
      <a href="{{ brand.linkUrl }}" target="_blank" rel="noopener noreferrer">
        <img src="{{ brand.logoUrl }}" alt="{{ brand.name }} logo">
      </a>
    {% else %}
      <span class="brand-name">{{ brand.name }}</span>
    {% endif %}
    <div class="toggles">
      <button class="toggle" type="submit" name="action" value="toggle_brand">{{ t.switchBrand }}</button>
      <button class="toggle" type="submit" name="action" value="toggle_language">{{ t.switchLang }}</button>
    </div>
  </div>

  <h1>{{ t.title }}</h1>
  <p class="muted">{{ t.description }}</p>

  <div class="formula">
    <strong>{{ t.formulaHeading }}</strong>
    <p>{{ t.formula }}</p>
    <strong>{{ t.exampleHeading }}</strong>
    <p>{{ t.example }}</p>
  </div>

  <div class="fields">
    <label>{{ t.balance }}
      <input type="text" name="balance" value="{{ form.balance }}" placeholder="e.g. 100,000.00" inputmode="decimal">
    </label>
    <label>{{ t.rate }}
      <input type="number" name="rate" value="{{ form.rate }}" step="0.01" min="0" placeholder="e.g. 5.45">
    </label>
    <label>{{ t.startDate }}
      <input type="date" name="start_date" value="{{ form.start_date }}" max="{{ today }}">
    </label>
    <label>{{ t.evaluationDate }}
      <input type="date" name="evaluation_date" value="{{ form.evaluation_date }}"
             {% if form.start_date %}min="{{ form.start_date }}"{% endif %}>
    </label>
    <p class="muted">{{ t.todayAutoCalc }}</p>
    <div class="buttons">
      <button class="btn-today" type="submit" name="action" value="today">{{ t.today }}</button>
      <button class="btn-calc" type="submit" name="action" value="calculate">{{ t.calculate }}</button>
    </div>
  </div>

  {% if not complete %}
    <p class="notice">{{ t.fillFields }}</p>
  {% endif %}

  {% if error %}
    <p class="error" role="alert">{{ error }}</p>
  {% endif %}

  {% if result %}
    <div class="result" id="result">
      <p>🗓️ {{ t.interestCycle }}</p>
      <p>📅 {{ t.daysAccrued }} <strong>{{ result.days_elapsed }}</strong></p>
      <p>📈 {{ t.interestAccrued }} <strong>${{ money(result.period_accrual) }}</strong></p>
      <p>💰 {{ t.estimatedInterest }} <strong>${{ money(result.projected_month_accrual) }}</strong></p>
      <p>⛔ {{ t.subjectChange }}</p>
    </div>
    <button class="btn-clear" type="submit" name="action" value="clear">{{ t.clear }}</button>
  {% endif %}
</form>
<footer>&copy; {{ year }} {{ brand.name }}</footer>
</body>
</html>
"""
