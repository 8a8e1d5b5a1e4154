from sqladmin import ModelView

from aipromote.billing.models import SubscriptionPlan
from aipromote.user.models import User


class UserAdmin(ModelView, model=User):
    name = "User"
    name_plural = "Users"

    column_list = [
        User.email,
        User.name,
        User.role,
        User.plan,
        User.verified,
        User.id,
        User.created_at,
        User.updated_at,
    ]

    column_searchable_list = [User.email, User.name]

    column_sortable_list = [
        User.email,
        User.name,
        User.role,
        User.plan,
        User.verified,
        User.created_at,
        User.updated_at,
    ]

    # Credentials and one-time tokens never leave the database.
    column_details_exclude_list = [
        User.hashed_password,
        User.email_verification_token,
        User.email_verification_expiry,
        User.reset_token,
        User.reset_token_expiry,
    ]
    form_excluded_columns = column_details_exclude_list


class SubscriptionPlanAdmin(ModelView, model=SubscriptionPlan):
    name = "Subscription Plan"
    name_plural = "Subscription Plans"

    column_list = [
        SubscriptionPlan.name,
        SubscriptionPlan.display_name,
        SubscriptionPlan.price_monthly,
        SubscriptionPlan.price_yearly,
        SubscriptionPlan.is_active,
        SubscriptionPlan.sort_order,
        SubscriptionPlan.stripe_price_id,
    ]

    column_searchable_list = [SubscriptionPlan.name, SubscriptionPlan.display_name]

    column_sortable_list = [
        SubscriptionPlan.name,
        SubscriptionPlan.price_monthly,
        SubscriptionPlan.is_active,
        SubscriptionPlan.sort_order,
    ]

    column_default_sort = [(SubscriptionPlan.sort_order, False)]
