"""
Transactional email templates.

Each builder returns a ready-to-send EmailMessage. User-supplied values
(names, project titles) are HTML-escaped before interpolation.
"""

from html import escape

from .models import EmailMessage

APP_NAME = "Task Tracker"


def otp_email(to: str, code: str, ttl_minutes: int, support_email: str) -> EmailMessage:
    """Verification code for a registration attempt."""
    return EmailMessage(
        to=to,
        subject=f"🔐 Verify Your Email - {APP_NAME}",
        html=f"""
      <div style="font-family: Arial, sans-serif; padding: 20px; line-height: 1.6; background-color: #f9f9f9; color: #333;">
        <h2 style="color: #4CAF50;">🔐 Email Verification</h2>
        <p>Hello,</p>
        <p>Thank you for starting your registration on <strong>{APP_NAME}</strong>.</p>
        <p>Your OTP is:</p>
        <div style="font-size: 24px; font-weight: bold; color: #000; margin: 10px 0;">{code}</div>
        <p>This code is valid for <strong>{ttl_minutes} minutes</strong>.</p>
        <p>Please complete your registration using this OTP. If you did not initiate this request, you can safely ignore this email.</p>
        <hr style="border: none; border-top: 1px solid #ddd; margin: 20px 0;">
        <p style="font-size: 14px; color: #555;">Need help? Contact us at {escape(support_email)}</p>
      </div>
      """,
    )


def welcome_email(to: str, name: str) -> EmailMessage:
    return EmailMessage(
        to=to,
        subject=f"🎉 Welcome to {APP_NAME}!",
        html=f"""
      <div style="font-family: Arial, sans-serif; padding: 20px; line-height: 1.6;">
        <h2 style="color: #4CAF50;">Hi {escape(name)},</h2>
        <p>Welcome to <strong>{APP_NAME}</strong>! 🎉</p>
        <p>We're thrilled to have you on board. You can now create, manage, and track your tasks more efficiently than ever before.</p>
        <p>Start by creating your first project or exploring the dashboard.</p>
        <hr style="border: none; border-top: 1px solid #ddd;">
        <p style="font-size: 14px; color: #555;">If you have any questions, feel free to reply to this email. We're always here to help!</p>
        <p style="margin-top: 30px;">Cheers,<br>The {APP_NAME} Team</p>
      </div>
      """,
    )


def project_created_email(to: str, name: str, title: str, frontend_url: str) -> EmailMessage:
    return EmailMessage(
        to=to,
        subject="✅ Project Created Successfully!",
        html=f"""
        <div style="font-family: Arial, sans-serif; padding: 20px; background-color: #eef9f1; border-radius: 10px;">
          <h2 style="color: #2e7d32;">Hi {escape(name)},</h2>
          <p>Your new project <strong>"{escape(title)}"</strong> has been created successfully in <strong>{APP_NAME}</strong>.</p>
          <p>You can now start adding tasks, assigning members, and tracking progress.</p>
          <a href="{frontend_url}/projects" style="display: inline-block; margin-top: 15px; padding: 10px 20px; background-color: #2e7d32; color: white; text-decoration: none; border-radius: 5px;">View Project</a>
          <p style="margin-top: 30px; font-size: 12px; color: #777;">If this wasn't you, please contact support.</p>
        </div>
      """,
    )


def project_updated_email(
    to: str, name: str, title: str, project_id: str, frontend_url: str
) -> EmailMessage:
    return EmailMessage(
        to=to,
        subject="🔄 Project Updated",
        html=f"""
    <div style="font-family: Arial, sans-serif; padding: 20px; background-color: #fffbe6; border-radius: 10px;">
      <h2 style="color: #e69138;">Hello {escape(name)},</h2>
      <p>Your project <strong>"{escape(title)}"</strong> has been successfully updated.</p>
      <p>If you made changes by mistake or have concerns, you can always revert or check project history.</p>
      <a href="{frontend_url}/projects/{project_id}" style="display: inline-block; margin-top: 15px; padding: 10px 20px; background-color: #e69138; color: white; text-decoration: none; border-radius: 5px;">View Updated Project</a>
      <p style="margin-top: 30px; font-size: 12px; color: #777;">If you didn't perform this update, please contact our support team immediately.</p>
    </div>
  """,
    )


def project_deleted_email(to: str, name: str, title: str) -> EmailMessage:
    return EmailMessage(
        to=to,
        subject="🗑️ Project Deleted",
        html=f"""
          <div style="font-family: Arial, sans-serif; padding: 20px; background-color: #ffeaea; border-radius: 10px;">
            <h2 style="color: #cc0000;">Hi {escape(name)},</h2>
            <p>The project <strong>"{escape(title)}"</strong> has been permanently deleted from your workspace.</p>
            <p>If you didn't perform this action, please reach out to support immediately.</p>
            <p style="margin-top: 30px; font-size: 12px; color: #777;">This is an automated message from {APP_NAME} System.</p>
          </div>
        """,
    )


def project_completed_email(to: str, name: str, title: str) -> EmailMessage:
    return EmailMessage(
        to=to,
        subject="✅ Project Completed",
        html=f"""
      <div style="font-family: Arial, sans-serif; padding: 20px; background-color: #e6ffe6; border-radius: 10px;">
        <h2 style="color: #2e7d32;">Hi {escape(name)},</h2>
        <p>Congratulations! Your project <strong>"{escape(title)}"</strong> has been marked as <strong>completed</strong>.</p>
        <p>Thank you for using {APP_NAME}. Keep up the great work!</p>
        <p style="margin-top: 30px; font-size: 12px; color: #777;">This is an automated message from {APP_NAME} System.</p>
      </div>
    """,
    )
