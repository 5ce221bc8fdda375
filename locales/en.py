"""English UI strings for flash messages and form notices."""

EN_STRINGS = {
    # === AUTH ===
    "login_welcome": "Welcome back! Successfully logged in.",
    "login_missing": "Please enter your email and password.",
    "signup_disabled": "Sign up is currently disabled.",
    "logout_done": "You have been signed out.",
    "resend_missing": "Enter the email address you signed up with.",
    "no_dashboard": "Your account does not have a dashboard yet.",

    # === PUBLIC FORMS ===
    "fill_all_fields": "Please fill in all fields",
    "contact_sent": "Message sent! We'll get back to you soon.",
    "contact_failed": "Failed to send message. Please try again.",
    "contact_disabled": "The contact form is currently unavailable.",

    # === CMS ===
    "section_saved": "Section {action} successfully",
    "section_save_failed": "Failed to update section",
    "toggled": "{noun} {state}",
    "toggle_failed": "Failed to update {noun} status",
    "page_saved": "Page {action} successfully",
    "page_save_failed": "Failed to save page",
    "page_deleted": "Page deleted successfully",
    "page_delete_failed": "Failed to delete page",
    "player_saved": "Player {action} successfully",
    "player_save_failed": "Failed to save player",
    "player_deleted": "Player deleted successfully",
    "player_delete_failed": "Failed to delete player",
    "partner_saved": "Partner {action} successfully",
    "partner_save_failed": "Failed to save partner",
    "partner_deleted": "Partner deleted successfully",
    "partner_delete_failed": "Failed to delete partner",
    "faq_saved": "FAQ {action} successfully",
    "faq_save_failed": "Failed to save FAQ. Make sure you have the required permissions.",
    "faq_deleted": "FAQ deleted successfully",
    "faq_delete_failed": "Failed to delete FAQ. You can only delete FAQs you created, or you need admin permissions.",
    "post_saved": "Post {action} successfully",
    "post_save_failed": "Failed to save post",
    "post_deleted": "Post deleted successfully",
    "post_delete_failed": "Failed to delete post",
    "message_read": "Message marked as read",
    "message_replied": "Reply saved",
    "message_failed": "Failed to update message",
    "message_deleted": "Message deleted successfully",
    "message_delete_failed": "Failed to delete message",
    "role_assigned": "Role {role} assigned",
    "role_revoked": "Role {role} revoked",
    "role_failed": "Failed to update roles",
    "load_failed": "Failed to load {what}",
}
