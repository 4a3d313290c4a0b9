"""Jinja2 templates for the executive outcomes report.

Templates receive the serialized analytics (``report``, camelCase keys),
the severity band colours and the methodology assumptions.
"""

BASE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset="UTF-8">
<title>{{ report.organization.name }} - Wellness Outcomes Report</title>
<style>
* { margin:0; padding:0; box-sizing:border-box; }
body { font-family:'Segoe UI',Arial,sans-serif; color:#1F2937; line-height:1.5; }
.page { page-break-after:always; padding:40px; }
.page:last-child { page-break-after:auto; }
.header { border-bottom:3px solid #3B82F6; padding-bottom:15px; margin-bottom:25px; }
.header h1 { font-size:24px; color:#1E3A8A; margin-bottom:5px; }
.header .subtitle { font-size:14px; color:#6B7280; }
.header .period { font-size:12px; color:#9CA3AF; margin-top:5px; }
.section { margin-bottom:25px; }
.section-title { font-size:16px; font-weight:600; color:#1E3A8A; margin-bottom:12px;
  padding-bottom:5px; border-bottom:1px solid #E5E7EB; }
.metrics-grid { display:grid; grid-template-columns:repeat(4,1fr); gap:15px; margin-bottom:20px; }
.metric-card { background:#F9FAFB; padding:15px; border-radius:8px; border-left:4px solid #3B82F6; }
.metric-card.success { border-left-color:#10B981; }
.metric-value { font-size:24px; font-weight:700; }
.metric-label { font-size:11px; color:#6B7280; text-transform:uppercase; letter-spacing:0.5px; margin-top:4px; }
.data-table { width:100%; border-collapse:collapse; font-size:12px; }
.data-table th { background:#F3F4F6; padding:10px; text-align:left; }
.data-table td { padding:10px; border-bottom:1px solid #E5E7EB; }
.highlight-box { background:linear-gradient(135deg,#3B82F6 0%,#1E40AF 100%); color:white;
  padding:20px; border-radius:10px; margin-bottom:20px; }
.highlight-box .big-number { font-size:36px; font-weight:700; }
.footer { margin-top:30px; padding-top:15px; border-top:1px solid #E5E7EB; font-size:10px; color:#9CA3AF; }
</style>
</head>
<body>
{% block content %}{% endblock %}
</body>
</html>
"""

SEVERITY_CHART_MACRO = """{% macro severity_chart(distribution, title) %}
<div class="severity-chart" style="margin:15px 0;">
  <div style="font-size:12px;font-weight:600;margin-bottom:8px;color:#374151;">{{ title }}</div>
  {% for band in distribution %}
  <div style="display:flex;align-items:center;margin:4px 0;">
    <div style="width:140px;font-size:11px;">{{ band.label }}</div>
    <div style="flex:1;background:#E5E7EB;height:18px;border-radius:4px;overflow:hidden;">
      <div style="width:{{ band.percentage or 0 }}%;background:{{ band_colors[loop.index0] }};height:100%;">
        <span style="font-size:10px;color:white;font-weight:600;">{{ band.percentage | percent }}</span>
      </div>
    </div>
  </div>
  {% endfor %}
</div>
{% endmacro %}
"""

REPORT_TEMPLATE = """{% extends "base.html" %}
{% block content %}
{% from "macros.html" import severity_chart with context %}
{% set org = report.organization %}
{% set clinical = report.clinical %}
{% set productivity = report.productivity %}
{% set engagement = report.engagement %}
{% set roi = report.roi %}
<div class="page" id="executive-summary">
  <div class="header">
    <h1>{{ org.name }}</h1>
    <div class="subtitle">Mental Wellness Program - Executive Outcomes Report</div>
    <div class="period">Reporting Period: {{ org.reportingPeriod.start }} to {{ org.reportingPeriod.end }}</div>
  </div>

  <div class="highlight-box">
    <h3>Return on Investment</h3>
    <div class="big-number">{{ roi.roi | percent }}</div>
    <div>
      Program investment of {{ roi.programCost | currency }}
      generated {{ roi.totalSavings | currency }} in estimated annual savings.
      Net benefit {{ roi.netBenefit | currency }}, payback period {{ roi.paybackPeriod or "Insufficient data" }}.
    </div>
  </div>

  <div class="section">
    <div class="section-title">Key Performance Indicators</div>
    <div class="metrics-grid">
      <div class="metric-card">
        <div class="metric-value">{{ engagement.enrolledCount | number }}</div>
        <div class="metric-label">Employees Enrolled</div>
      </div>
      <div class="metric-card success">
        <div class="metric-value">{{ engagement.engagementRate | percent }}</div>
        <div class="metric-label">Engagement Rate</div>
      </div>
      <div class="metric-card success">
        <div class="metric-value">{{ clinical.phq9.clinicallyImprovedPercent | percent }}</div>
        <div class="metric-label">Clinically Improved</div>
      </div>
      <div class="metric-card success">
        <div class="metric-value">{{ productivity.hoursRegained.annualized | number }}</div>
        <div class="metric-label">Hours Regained (Annualized)</div>
      </div>
    </div>
  </div>
</div>

<div class="page" id="clinical-outcomes">
  <div class="header">
    <h1>Clinical Outcomes</h1>
    <div class="subtitle">{{ org.name }}</div>
  </div>

  <table class="data-table">
    <tr><th>Measure</th><th>Baseline</th><th>Current</th><th>Change</th><th>Improved</th></tr>
    <tr>
      <td>PHQ-9 (Depression)</td>
      <td>{{ clinical.phq9.baselineMean }}</td>
      <td>{{ clinical.phq9.currentMean }}</td>
      <td>{{ clinical.phq9.meanChange }}</td>
      <td>{{ clinical.phq9.clinicallyImprovedCount | number }} ({{ clinical.phq9.clinicallyImprovedPercent | percent }})</td>
    </tr>
    <tr>
      <td>GAD-7 (Anxiety)</td>
      <td>{{ clinical.gad7.baselineMean }}</td>
      <td>{{ clinical.gad7.currentMean }}</td>
      <td>{{ clinical.gad7.meanChange }}</td>
      <td>{{ clinical.gad7.clinicallyImprovedCount | number }} ({{ clinical.gad7.clinicallyImprovedPercent | percent }})</td>
    </tr>
    <tr>
      <td>WHO-5 (Well-being)</td>
      <td>{{ clinical.who5.baselineMean }}</td>
      <td>{{ clinical.who5.currentMean }}</td>
      <td>{{ clinical.who5.meanChange }}</td>
      <td>{{ clinical.who5.meaningfullyImprovedCount | number }} ({{ clinical.who5.meaningfullyImprovedPercent | percent }})</td>
    </tr>
  </table>

  {{ severity_chart(clinical.phq9.baselineSeverityDistribution, "PHQ-9 Baseline Severity") }}
  {{ severity_chart(clinical.phq9.currentSeverityDistribution, "PHQ-9 Current Severity") }}

  <p>
    Severity movement: {{ clinical.phq9.severityMovement.improved | number }} improved,
    {{ clinical.phq9.severityMovement.maintained | number }} maintained,
    {{ clinical.phq9.severityMovement.worsened | number }} worsened.
  </p>
</div>

<div class="page" id="business-impact">
  <div class="header">
    <h1>Business Impact</h1>
  </div>

  <div class="highlight-box">
    <h3>Annual Productivity Savings</h3>
    <div class="big-number">{{ productivity.costSavings.annualized | currency }}</div>
    <div>
      Quarterly estimate {{ productivity.costSavings.mid | currency }}
      (range {{ productivity.costSavings.low | currency }} to {{ productivity.costSavings.high | currency }})
    </div>
  </div>

  <table class="data-table">
    <tr><th>Measure</th><th>Baseline</th><th>Current</th><th>Reduction</th></tr>
    <tr>
      <td>Absenteeism (hours/month)</td>
      <td>{{ productivity.absenteeism.baselineMean }}</td>
      <td>{{ productivity.absenteeism.currentMean }}</td>
      <td>{{ productivity.absenteeism.reduction }} ({{ productivity.absenteeism.reductionPercent | percent }})</td>
    </tr>
    <tr>
      <td>Presenteeism (% productivity loss)</td>
      <td>{{ productivity.presenteeism.baselineMean }}</td>
      <td>{{ productivity.presenteeism.currentMean }}</td>
      <td>{{ productivity.presenteeism.reduction }} ({{ productivity.presenteeism.reductionPercent | percent }})</td>
    </tr>
  </table>

  <p>
    Hours regained: {{ productivity.hoursRegained.total | number }} this quarter,
    {{ productivity.hoursRegained.perEmployee }} per employee.
  </p>

  <div class="section">
    <div class="section-title">Engagement</div>
    <table class="data-table">
      <tr><td>Engaged employees</td><td>{{ engagement.engagedCount | number }}</td></tr>
      <tr><td>Average sessions per employee</td><td>{{ engagement.avgSessionsPerUser }}</td></tr>
      <tr><td>Dropout rate</td><td>{{ engagement.dropoutRate | percent }}</td></tr>
      <tr><td>Average days to first session</td><td>{{ engagement.avgTimeToFirstSession }}</td></tr>
      {% for modality, count in engagement.modalitySplit.items() %}
      <tr><td>{{ modality | capitalize }} sessions</td><td>{{ count | number }}</td></tr>
      {% endfor %}
    </table>
  </div>
</div>

<div class="page" id="methodology">
  <div class="header">
    <h1>Methodology &amp; Disclaimer</h1>
  </div>
  <ul>
    <li>Clinically meaningful improvement: PHQ-9 reduction of {{ assumptions.phq9_threshold }}+ points,
      GAD-7 reduction of {{ assumptions.gad7_threshold }}+ points, WHO-5 increase of {{ assumptions.who5_threshold }}+ points.</li>
    <li>Presenteeism converted to hours using a {{ assumptions.monthly_hours }}-hour working month.</li>
    <li>Cohort data covers one quarter; annual figures multiply by {{ assumptions.annualization_factor }}.</li>
    <li>Savings range: {{ assumptions.low_factor_percent }}% (conservative) to {{ assumptions.high_factor_percent }}% (optimistic) of the mid estimate.</li>
    <li>Weekly trends are shown only for weeks with at least {{ assumptions.minimum_cohort }} participants.</li>
  </ul>
  <div class="footer">
    <p>{{ report.disclaimer }}</p>
    <p>Generated {{ report.generatedAt }}</p>
  </div>
</div>
{% endblock %}
"""

TEMPLATES = {
    "base.html": BASE_TEMPLATE,
    "macros.html": SEVERITY_CHART_MACRO,
    "report.html": REPORT_TEMPLATE,
}
