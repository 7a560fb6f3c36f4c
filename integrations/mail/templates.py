"""Welcome mail content."""

WELCOME_SUBJECT = "Welcome to the ORBIT SaaS Waitlist!"

WELCOME_HTML = """
<div style="font-family: Helvetica, Arial, sans-serif; max-width: 600px; margin: 0 auto; padding: 40px 20px; color: #1a1a2e;">
  <h1 style="color: #6c5ce7; text-align: center; font-size: 28px;">ORBIT SaaS</h1>
  <div style="background: #ffffff; border-radius: 12px; padding: 40px; border: 1px solid #eef0f6;">
    <h2 style="margin-top: 0; font-size: 22px;">You're on the list!</h2>
    <p style="font-size: 16px; line-height: 1.6; color: #64648a;">
      Thank you for joining the ORBIT SaaS waitlist. We'll keep you updated with our latest
      launches, tools and early-access features.
    </p>
    <p style="font-size: 14px; color: #8888a0; text-align: center;">
      Stay awesome,<br><strong>The ORBIT SaaS Team</strong>
    </p>
  </div>
</div>
"""
